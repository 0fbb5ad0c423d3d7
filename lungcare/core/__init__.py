"""
Core Engine - entity mapping, risk scoring and the per-analysis session
"""
