# Copyright (c) turso-platform-sdk contributors.
# Licensed under the MIT license.

"""Version information for the Turso Platform API SDK."""

__version__ = "0.1.0"
