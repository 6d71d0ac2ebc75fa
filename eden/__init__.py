# SPDX-License-Identifier: MIT
"""eden - developer onboarding preflight checks."""

__version__ = "0.3.0"
