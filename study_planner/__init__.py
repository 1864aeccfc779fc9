"""Weekly study timetable generation service."""
