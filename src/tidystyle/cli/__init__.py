# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""tidystyle CLI package.

The Typer application lives in :mod:`tidystyle.cli.app`; it is not imported
here so the task layer can depend on :mod:`tidystyle.cli.shared` alone.
"""

from __future__ import annotations
