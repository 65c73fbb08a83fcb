from strapictl.cli import app

app(prog_name="strapictl")
