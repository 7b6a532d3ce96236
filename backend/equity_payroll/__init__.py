"""
Equity payroll backend package.
"""
