"""MentorConnect: mentor directory, session booking and feedback."""
