__version__ = "0.1.0"
version = __version__
__version_tuple__ = version_tuple = (0, 1, 0)
