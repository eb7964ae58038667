"""Pydantic models for drivers and assistant traffic"""
