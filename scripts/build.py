#!/usr/bin/env python3
"""
Build script for the deals service Lambda functions.

Every function directory under ``src/`` is zipped together with the shared
``deals_service`` package.
"""
import shutil
import subprocess
import sys
import zipfile
from pathlib import Path

SHARED_PACKAGE = "deals_service"


def is_function_dir(path: Path) -> bool:
    return path.is_dir() and (path / "lambda_function.py").exists()


def write_zip(source_dir: Path, zip_path: Path) -> None:
    with zipfile.ZipFile(zip_path, "w", zipfile.ZIP_DEFLATED) as zipf:
        for file_path in sorted(source_dir.rglob("*")):
            if file_path.is_file():
                zipf.write(file_path, file_path.relative_to(source_dir))


def main():
    """Main build function"""
    project_root = Path(__file__).parent.parent
    src_dir = project_root / "src"
    build_dir = project_root / "build"
    shared_dir = src_dir / SHARED_PACKAGE

    build_dir.mkdir(exist_ok=True)

    functions = sorted(d for d in src_dir.iterdir() if is_function_dir(d))

    print(f"Building Lambda functions: {[f.name for f in functions]}")

    for function_dir in functions:
        function_name = function_dir.name
        zip_path = build_dir / f"{function_name}.zip"

        print(f"Building {function_name}...")

        temp_dir = build_dir / f"temp_{function_name}"
        if temp_dir.exists():
            shutil.rmtree(temp_dir)
        temp_dir.mkdir()

        ignore = shutil.ignore_patterns("__pycache__", "*.pyc", "test_*.py")
        shutil.copytree(function_dir, temp_dir, dirs_exist_ok=True, ignore=ignore)
        shutil.copytree(shared_dir, temp_dir / SHARED_PACKAGE, ignore=ignore)

        requirements_file = function_dir / "requirements.txt"
        if requirements_file.exists():
            print(f"Installing dependencies for {function_name}...")
            subprocess.run([
                sys.executable, "-m", "pip", "install",
                "-r", str(requirements_file),
                "-t", str(temp_dir),
                "--no-deps"
            ], check=True)

        print(f"Creating {function_name}.zip...")
        write_zip(temp_dir, zip_path)

        shutil.rmtree(temp_dir)

        print(f"{function_name}.zip created ({zip_path.stat().st_size} bytes)")

    print("Build complete!")


if __name__ == "__main__":
    main()
