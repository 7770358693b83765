"""Contract tests.

Run the same repository behaviour against every adapter listed in the
`repo_factory` fixture so backends stay interchangeable. Assert the public
contract only: return values, raised errors and their messages.
"""
