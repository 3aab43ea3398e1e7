#!/usr/bin/env python

""" Sweep beliefs and report what a policy picks in an example problem """

from pomdp_examples.greedy_tutorial import main

if __name__ == '__main__':
    main(None)
