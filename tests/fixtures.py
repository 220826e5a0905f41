"""
Shared test documents.
"""

BUS254_SYLLABUS = """
      BUS254 Managerial Accounting - Fall 2023

      INSTRUCTOR: Dr. Hwee Cheng Tan

      D100 (Burnaby)
      Lecture: Thursday 10:30am - 12:20pm
      Venue: B9200

      E100 (Burnaby)
      Lecture: Wednesday 4:30-6:20 pm
      Venue: C9002

      COURSE OUTLINE:

      Week 1 | Sep 6-7 | Intro to course, Basic cost concepts | Chap 1, Chap 2
      Week 2 | Sep 13-14 | Preparation of manufacturing accounts, Job-order costing | Chap 2, Chap 3
      Week 3 | Sep 20-21 | Job-order costing (II) | Chap 3
      Week 4 | Sep 27-28 | Activity-based costing | Chap 5
      Week 5 | Oct 4-5 | Alternative inventory costing methods | Chap 8
      Week 6 | Oct 11-12 | Cost volume profit analysis | Chap 6
      Week 7 | Oct 18-19 | Incremental analysis | Chap 7
      Week 8 | Oct 25-26 | Mid-term Exam (Topics in weeks 1 to 5) | No tutorials
      Week 9 | Nov 1-2 | Pricing | Chap 9
      Week 10 | Nov 8-9 | Budgetary planning | Chap 10
      Week 11 | Nov 15-16 | Budgetary control and responsibility accounting | Chap 11
      Week 12 | Nov 22-23 | Standard cost and variance analysis | Chap 12
      Week 13 | Nov 29-30 | Review

      Final Exam: To be announced (December)

      ASSESSMENT:
      Homework: 8% - Due weekly at tutorials
      Groupwork: 12%
      Tutorial participation: 3%
      Mid-term: 19% - Week 8
      Final Exam: 58%
"""

MIDTERM_ROW = "Week 8 | 25 Oct 2023 | Mid-term Exam (Topics in weeks 1 to 5) | No tutorials this week"
