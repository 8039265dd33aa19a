from cargo_project.main import app

app(prog_name="cargo-project")
