"""Course Catalog CLI - ``course-catalog`` command-line interface."""
