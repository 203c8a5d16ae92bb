"""Website lifecycle manager.

Provisions websites from catalog templates, tracks their status and answers
search and statistics queries over the managed collection.
"""
