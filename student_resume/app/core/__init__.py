"""This module serves as the initialization file for the core package.

Attributes:
    - None

Notes:
    1. Settings live in core.config and the template palettes in
       core.rendering_settings.
    2. This file does not perform any operations and is used solely for package initialization.

"""
