"""
Academic record models the quiz generator reads from.

Subjects own assignments and class materials; both carry a title,
an optional description and an optional stored attachment.
"""
