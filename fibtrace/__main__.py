from fibtrace.cli import main_entry

main_entry()
