#!/usr/bin/env python3
"""
Option Return Calculator - Main Entry Point

Evaluates short puts (sp) and covered calls (cc): days in market, capital
at risk, maximum value, and the raw and annualized returns.
"""

from optn.cli.app import main


if __name__ == '__main__':
    raise SystemExit(main())
