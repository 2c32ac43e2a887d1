"""parensearch — find where one pair of parentheses makes an expression hit a target.

Tokenizes an integer expression using `+` and `*`, then tries every way to
wrap a contiguous sub-expression in a single pair of parentheses and reports
the placements whose value equals the target.

Usage:
    python -m parensearch search                    # 1 + 2 * 3 + ... + 8 * 9, target 479
    python -m parensearch search -e "2 + 3 * 4" -t 20
    python -m parensearch eval "2 + 3 * 4"          # 14
"""
