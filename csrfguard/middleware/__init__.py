"""Request interception for CSRF-protected handlers"""
