"""Quiz grading HTTP service"""
