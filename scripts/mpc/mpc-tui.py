#!/usr/bin/env python3
"""Thin compatibility entrypoint for the mpc-tui form engine."""

from __future__ import annotations

from mpc_tui.app import main


if __name__ == "__main__":
    raise SystemExit(main())
