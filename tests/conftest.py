import pytest


@pytest.fixture
def project_tree(tmp_path):
    """
    Sets up a small fake project:

        project/
            a.js
            README.TXT
            src/app.PY
            src/lib/util.ts
            .env
            .git/hooks/x
            node_modules/pkg/index.js
    """
    root = tmp_path / "project"
    (root / "src" / "lib").mkdir(parents=True)
    (root / ".git" / "hooks").mkdir(parents=True)
    (root / "node_modules" / "pkg").mkdir(parents=True)

    (root / "a.js").write_text("\n\n  console.log('a');  \n\n")
    (root / "README.TXT").write_text("readme\n")
    (root / "src" / "app.PY").write_text("print('app')\n")
    (root / "src" / "lib" / "util.ts").write_text("export const x = 1;\n")
    (root / ".env").write_text("SECRET=1\n")
    (root / ".git" / "hooks" / "x").write_text("#!/bin/sh\n")
    (root / "node_modules" / "pkg" / "index.js").write_text("module.exports = {};\n")
    return root
