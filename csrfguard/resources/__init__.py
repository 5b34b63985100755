"""Externally addressable resources"""
