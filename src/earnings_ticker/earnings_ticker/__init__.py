"""Earnings Ticker package.

This package is organized by feature modules (shifts, accrual, state, ticker, ...)
with a thin Flask controller layer on top of a pure accrual core.
"""
