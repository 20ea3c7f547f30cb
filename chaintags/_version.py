__version__ = 'v1.0.0'
