# projects/tests/__init__.py
"""
Project App Test Suite
======================

Modules:
--------
- factories: Helpers creating contributors, projects and tasks
- test_identity: Name/owner validation rules (no database)
- test_tokens: Contributor token parsing and rendering
- test_models: Project behaviour against the database
- test_scoreboard: Ranking cache and its invalidation
- test_services: Create / destroy / cleanup workflows

Running Tests:
--------------
    python manage.py test projects
    python manage.py test projects.tests.test_models
"""
