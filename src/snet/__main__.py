from snet.cli import main

main(prog_name="snet4")
