"""Unittests for use with py.test"""
