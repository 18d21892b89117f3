# Services package init
"""
Notes API — Services Layer
===========================

What:  State and rules behind the routes.

Service Inventory:
    - NoteStore: in-memory note collection with the max+1 id scheme

Routes never build or mutate notes themselves; they call the store the
application instance owns (see notes_api.dependencies.get_note_store).
"""
