"""Intent resolution and response synthesis"""
