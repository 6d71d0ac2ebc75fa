# SPDX-License-Identifier: MIT
"""Application services: running checks and scaffolding configs."""
