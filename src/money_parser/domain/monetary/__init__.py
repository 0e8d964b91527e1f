"""Monetary domain package.

This package contains the `Money` value object, the `Currency` enumeration and the
`MoneyParser` that turns text like "100 Euro" into `Money` or a classified `MoneyError`.
"""
