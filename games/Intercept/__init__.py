"""Intercept - build a course, then fly through it to catch the moving target."""
