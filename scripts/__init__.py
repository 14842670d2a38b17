"""
Command-line entry points: trigger, generate-json, generate-report,
list-data-files and run-scenarios.
"""
