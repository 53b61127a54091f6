"""
documents/samples.py
====================
The small worked example (4 intersections, 5 streets, 2 cars) in both wire
formats.  Scoring :data:`EXAMPLE_SCHEDULE` against :data:`EXAMPLE_NETWORK`
yields 1002 points.
"""

EXAMPLE_NETWORK = (
    "6 4 5 2 1000\n"
    "2 0 rue-de-londres 1\n"
    "0 1 rue-d-amsterdam 1\n"
    "3 1 rue-d-athenes 1\n"
    "2 3 rue-de-rome 2\n"
    "1 2 rue-de-moscou 3\n"
    "4 rue-de-londres rue-d-amsterdam rue-de-moscou rue-de-rome\n"
    "3 rue-d-athenes rue-de-moscou rue-de-londres\n"
)

EXAMPLE_SCHEDULE = (
    "3\n"
    "1\n"
    "2\n"
    "rue-d-athenes 2\n"
    "rue-d-amsterdam 1\n"
    "0\n"
    "1\n"
    "rue-de-londres 2\n"
    "2\n"
    "1\n"
    "rue-de-moscou 1\n"
)

EXAMPLE_SCORE = 1002
