# tasks/tests/__init__.py
"""
Task App Test Suite
===================

This package contains unit and integration tests for the tasks application.

Modules:
--------
- test_board: Unit tests for the board aggregator (no database)
- test_ledger: Unit tests for contributor scoring (no database)
- test_models: Task and Comment model defaults
- test_celery_tasks: The background Done -> Out sweep

Running Tests:
--------------
    # Run all task tests
    python manage.py test tasks

    # Run specific test module
    python manage.py test tasks.tests.test_ledger

    # Run with verbose output
    python manage.py test tasks -v 2
"""
