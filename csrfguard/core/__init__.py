"""Core configuration, errors, logging and security primitives"""
