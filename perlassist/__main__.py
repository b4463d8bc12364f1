from perlassist.cli import app

app(prog_name="perlassist")
