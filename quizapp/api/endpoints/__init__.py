"""Endpoint routers"""
