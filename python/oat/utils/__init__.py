"""
Password generation and input validation utilities for oat.
"""

from .password_generator import ConstraintSpec, PasswordGenerator, build_charset, generate_passwords, sample

__all__ = ['ConstraintSpec', 'PasswordGenerator', 'build_charset', 'generate_passwords', 'sample']
