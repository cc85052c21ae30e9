# Copyright (c) turso-platform-sdk contributors.
# Licensed under the MIT license.
