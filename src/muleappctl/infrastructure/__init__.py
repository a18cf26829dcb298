"""Infrastructure layer — runtime home lookup, file copies, zip access.

This layer depends only on stdlib.  It raises plain ``OSError`` /
``zipfile`` errors; the service layer wraps them into typed install errors.
"""
