import sys

from db import init_db, SessionLocal, Company


def add_company(db, name):
    existing = db.query(Company).filter(Company.name == name).first()
    if existing:
        print(f"Company {name!r} exists ({existing.id}). Skipping.")
        return existing
    company = Company(name=name)
    db.add(company)
    db.commit()
    print(f"Created {company.id} ({name})")
    return company


def main(names=None):
    init_db()
    with SessionLocal() as db:
        for name in names or ["Acme Corp", "Globex", "Initech"]:
            add_company(db, name)


if __name__ == "__main__":
    main(sys.argv[1:])
