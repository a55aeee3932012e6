"""
Exercise Grader: Automated exercise grading against a Piston execution service

Submits every solution/input pair declared in a rules file to a remote
code-execution service and reports a pass/fail verdict per expected output.
"""

__version__ = "0.1.0"
