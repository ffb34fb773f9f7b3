"""
Generation subsystem — day expansion from city stops and greedy day suggestions.
"""
