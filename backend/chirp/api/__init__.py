"""
HTTP and WebSocket surface of Chirp.

    main.py          create_application() and the module-level app
    __main__.py      `python -m chirp.api` / `chirp-api`
    routes.py        router table (/api/*, probes, /ws)
    dependencies/    session, current user, pagination, services, post gates
    handlers/        one router per resource
    middleware/      request logging and exception handlers
"""
