"""Flet UI for the edge sheet"""
