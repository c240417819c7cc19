"""
The MODEL layer contains pure data structures and conversion logic.
It has NO knowledge of the GUI (Qt widgets), the clipboard or timers.
It deals with the Catalog, number parsing/formatting and the Session reducer.
"""
