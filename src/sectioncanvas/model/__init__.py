"""
The MODEL layer contains pure data structures and the viewport math.
It has NO knowledge of the GUI (Qt) or of where gesture samples come from.
"""
