"""Worked solutions to some of the exercises, written as plain functions and classes."""