"""
generator/html.py — render Document do strony HTML.

Drzewo budowane jest przez BeautifulSoup (new_tag + .string), więc cała
treść pól jest escapowana przez bs4 — znaki "<", "&" z komentarzy Fortran
nie psują struktury strony.

Struktura:
  <h1>plik</h1>
  <section id="entry-N">          — jeden na DocumentEntry
    <h2>tytuł wpisu</h2>
    <dl> <dt>TAG</dt> <dd><pre>treść</pre></dd> … </dl>
  </section>
"""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

from data_model.documents import Document, DocumentEntry

_SKELETON = """<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title></title>
<style>
  body { font-family: Verdana, Geneva, Arial, Helvetica, sans-serif; margin: 2em; }
  dt   { font-weight: bold; margin-top: 0.8em; }
  pre  { background: #EEEEFF; padding: 0.5em; }
</style>
</head>
<body></body>
</html>"""


def _entry_section(soup: BeautifulSoup, entry: DocumentEntry) -> Tag:
    section = soup.new_tag("section", id=f"entry-{entry.index + 1}")
    h2 = soup.new_tag("h2")
    h2.string = entry.title
    section.append(h2)

    dl = soup.new_tag("dl")
    for f in entry.fields:
        dt = soup.new_tag("dt")
        dt.string = f.tag.upper()
        dd = soup.new_tag("dd")
        pre = soup.new_tag("pre")
        pre.string = f.value
        dd.append(pre)
        dl.append(dt)
        dl.append(dd)
    section.append(dl)
    return section


def render_html(document: Document) -> str:
    soup = BeautifulSoup(_SKELETON, "html.parser")
    soup.title.string = document.name

    body = soup.body
    h1 = soup.new_tag("h1")
    h1.string = document.name
    body.append(h1)

    if document.is_empty:
        p = soup.new_tag("p")
        p.string = "Brak dokumentacji w pliku źródłowym."
        body.append(p)

    # Spis treści
    if len(document.entries) > 1:
        ul = soup.new_tag("ul", attrs={"class": "toc"})
        for entry in document.entries:
            li = soup.new_tag("li")
            a = soup.new_tag("a", href=f"#entry-{entry.index + 1}")
            a.string = entry.title
            li.append(a)
            ul.append(li)
        body.append(ul)

    for entry in document.entries:
        body.append(_entry_section(soup, entry))

    return str(soup)
