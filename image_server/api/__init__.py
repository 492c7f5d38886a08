"""API层"""
