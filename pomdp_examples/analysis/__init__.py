"""Analysis of policy decisions"""
