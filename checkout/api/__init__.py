# checkout/api/__init__.py
