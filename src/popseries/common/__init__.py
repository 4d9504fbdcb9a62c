"""src/popseries/common/__init__.py"""
