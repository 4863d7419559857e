"""Command parsing and execution"""
