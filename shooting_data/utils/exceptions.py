class NYPDShootingException(Exception):
    """Base Exception Class"""
    pass
class InvalidInput(NYPDShootingException):
    """Error for inputs a statistical test cannot be computed from"""
    pass
class MissingData(InvalidInput):
    """Error for when an observation or weight is absent for a required category"""
    pass
class DataProcessingError(NYPDShootingException):
    """Error for Loading or Processing the incident Data"""
    pass
class ConfigError(NYPDShootingException):
    """Config Error"""
    pass
