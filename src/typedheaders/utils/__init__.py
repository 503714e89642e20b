"""src/typedheaders/utils/__init__.py"""
