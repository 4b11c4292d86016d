"""
Put the resume document into the store. The web app never writes resumes,
so this is the only way a record gets there.

    python seed_resume.py path/to/Resume.pdf
    python seed_resume.py --generate
"""

import argparse
import mimetypes
import sys
from pathlib import Path
from typing import List, Optional

from fpdf import FPDF
from fpdf.enums import XPos, YPos

import site_content
from config import Settings
from portfolio_models import Profile, Resume
from profile_service import ProfileService, ProfileUnavailable
from record_store import RecordStore, SQLiteRecordStore, StoreError


def _latin1(text: str) -> str:
    # core PDF fonts only cover latin-1
    return text.encode("latin-1", "replace").decode("latin-1")


# -------------------------
# GENERATED PDF
# -------------------------

class ResumePDF(FPDF):
    def __init__(self, owner: str):
        super().__init__(orientation="P", unit="mm", format="A4")
        self.owner = owner
        self.set_margins(left=15, top=15, right=15)

    def header(self):
        self.set_font("Helvetica", "B", 16)
        self.cell(0, 10, _latin1(self.owner), align="C", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        self.ln(2)

    def footer(self):
        self.set_y(-15)
        self.set_font("Helvetica", "", 8)
        self.cell(0, 8, f"Page {self.page_no()}", align="C")

    def section(self, title: str):
        self.ln(3)
        self.set_font("Helvetica", "B", 12)
        self.cell(0, 8, _latin1(title), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        self.set_font("Helvetica", "", 10)

    def para(self, text: str):
        self.multi_cell(0, 5, _latin1(text), new_x=XPos.LMARGIN, new_y=YPos.NEXT)


def build_resume_pdf(profile: Profile) -> bytes:
    """One-page resume from the stored profile and the site's fixed content."""
    pdf = ResumePDF(profile.name)
    pdf.add_page()

    pdf.set_font("Helvetica", "I", 11)
    pdf.para(profile.title)

    contact = site_content.CONTACT
    pdf.section("Contact")
    pdf.para(f"{contact['email']} | {contact['phone']} | {contact['location']}")
    pdf.para(f"{contact['linkedin']}")
    pdf.para(f"{contact['github']}")

    pdf.section("Summary")
    pdf.para(profile.bio)

    pdf.section("Skills")
    pdf.para(", ".join(site_content.ABOUT["skills"]))

    pdf.section("Projects")
    for project in site_content.PROJECTS:
        pdf.set_font("Helvetica", "B", 10)
        pdf.para(project["title"])
        pdf.set_font("Helvetica", "", 10)
        pdf.para(project["description"])
        pdf.para("Stack: " + ", ".join(project["tech_stack"]))

    return bytes(pdf.output())


# -------------------------
# SEEDING
# -------------------------

def seed_from_file(store: RecordStore, path: Path, name: Optional[str] = None,
                   content_type: Optional[str] = None) -> Resume:
    guessed, _ = mimetypes.guess_type(path.name)
    return store.create(
        Resume,
        {
            "name": name or path.name,
            "data": path.read_bytes(),
            "content_type": content_type or guessed or "application/pdf",
        },
    )


def seed_generated(store: RecordStore, name: str = "Resume.pdf") -> Resume:
    profile = ProfileService(store).get_profile()
    return store.create(
        Resume,
        {"name": name, "data": build_resume_pdf(profile), "content_type": "application/pdf"},
    )


def main(argv: Optional[List[str]] = None, store: Optional[RecordStore] = None) -> int:
    parser = argparse.ArgumentParser(description="Store the resume document served at /resume.")
    parser.add_argument("file", nargs="?", type=Path, help="document to store (usually a PDF)")
    parser.add_argument("--name", help="file name shown to visitors")
    parser.add_argument("--content-type", help="MIME type (guessed from the file name if omitted)")
    parser.add_argument("--generate", action="store_true", help="build a PDF from the stored profile")
    args = parser.parse_args(argv)

    if store is None:
        settings = Settings.from_env()
        print(f"[INFO] DB_PATH = {settings.db_path}")
        store = SQLiteRecordStore(settings.db_path)

    if bool(args.file) == args.generate:
        print("[ERR] Give either a file or --generate")
        return 2

    try:
        store.connect()
        if store.count(Resume):
            print("[WARN] A resume is already stored; nothing to do")
            return 1

        if args.generate:
            resume = seed_generated(store, name=args.name or "Resume.pdf")
        else:
            if not args.file.is_file():
                print(f"[ERR] File not found: {args.file}")
                return 1
            resume = seed_from_file(store, args.file, name=args.name, content_type=args.content_type)
    except (StoreError, ProfileUnavailable) as e:
        print(f"[ERR] Store failure: {e}")
        return 1

    print(f"[OK] Stored {resume.name} ({len(resume.data)} bytes, {resume.content_type})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
