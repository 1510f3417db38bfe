"""Worked solutions to well-known algorithm exercises, often in several versions."""