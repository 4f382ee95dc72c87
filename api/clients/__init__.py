"""
Client records: CRUD, competitor URLs and the automation trigger.
"""
