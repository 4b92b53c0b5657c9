"""Readers turning files into raw text."""
