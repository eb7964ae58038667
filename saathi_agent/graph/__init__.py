"""LangGraph workflow, intent rules and handlers"""
