"""Problems, beliefs and policies to illustrate single-step decision making"""
