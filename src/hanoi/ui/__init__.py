"""Terminal presentation layer — curses session, renderer, input, shell."""
