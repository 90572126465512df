"""
This module holds the HTTP surface of the student resume service.

Notes:
    1. Routes are defined in the routes package and mounted by app.main.create_app.
    2. Route handlers stay thin; lookups and rendering live in routes.route_logic.
    3. The only public endpoint serves a shared resume identified by its share id.

"""
