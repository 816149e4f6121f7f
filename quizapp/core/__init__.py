"""Core configuration, persistence, security and error handling"""
