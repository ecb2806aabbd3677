"""Searches, path counting, strong components and maximum flow on directed graphs."""