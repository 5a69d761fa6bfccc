"""Print the schema repair script, e.g. `python -m scripts.print_remediation | psql $DATABASE_URL`."""

from app.core.remediation import REMEDIATION_SCRIPT


def main():
    print(REMEDIATION_SCRIPT, end="")

if __name__ == "__main__":
    main()
