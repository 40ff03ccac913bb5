"""
Wikipedia UI test harness.

`wikitests.ui_testing.framework` holds the browser session, waits, retries
and element actions; `wikitests.ui_testing.pages` the page objects; the
live suites sit in `wikitests/ui_testing/tests` and the framework tests on
the in-memory bridge in `wikitests/unit`.
"""
