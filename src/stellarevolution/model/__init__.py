"""
The MODEL layer contains pure data structures and business logic.
It has NO knowledge of the GUI (Qt).
It deals with the stellar table, the evolutionary phases and the session state.
"""
