"""
LungCare - clinical entity mapping and lung-cancer risk scoring engine
"""
__version__ = "1.0.0"
