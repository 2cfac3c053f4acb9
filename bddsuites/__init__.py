"""
================================================================================
BDD Test Suites
================================================================================

Test suites for the OMR Branch hotel booking site.

Suites:
    - ui_testing: Playwright framework, page objects and BDD scenarios
    - unit: Framework unit tests against the in-memory browser

================================================================================
"""
