## util_exceptions.py

class LogDirectoryError(Exception):
    """Exception class raised for errors related to the creation of the package logging directory"""
    pass
