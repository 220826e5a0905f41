"""
SmartSchedule: turn syllabi and other schedule documents into calendar events.
"""
