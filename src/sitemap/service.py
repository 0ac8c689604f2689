from datetime import datetime, timedelta
from typing import Iterable, List
import xml.etree.ElementTree as ET

from src.db.models import TopPage, TopLevelCategory
from src.config import Config

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"

CATEGORY_URL = {
    TopLevelCategory.COURSES: "/courses",
    TopLevelCategory.SERVICES: "/services",
    TopLevelCategory.BOOKS: "/books",
    TopLevelCategory.PRODUCTS: "/products",
}


def sitemap_entries(pages: Iterable[TopPage], domain: str = None, now: datetime = None) -> List[dict]:
    domain = (domain or Config.DOMAIN).rstrip("/")
    now = now or datetime.now()
    yesterday = (now - timedelta(days=1)).isoformat(timespec="seconds")

    entries = [
        {"loc": domain, "lastmod": yesterday, "changefreq": "daily", "priority": "1.0"},
        {"loc": f"{domain}/courses", "lastmod": yesterday, "changefreq": "daily", "priority": "1.0"},
    ]
    for page in pages:
        route = CATEGORY_URL[TopLevelCategory(page.first_category)]
        lastmod = page.updated_at or now
        entries.append({
            "loc": f"{domain}{route}/{page.alias}",
            "lastmod": lastmod.isoformat(timespec="seconds"),
            "changefreq": "weekly",
            "priority": "0.7",
        })

    return entries


def build_sitemap(entries: List[dict]) -> str:
    urlset = ET.Element("urlset", xmlns=SITEMAP_NAMESPACE)
    for entry in entries:
        url = ET.SubElement(urlset, "url")
        for tag in ("loc", "lastmod", "changefreq", "priority"):
            ET.SubElement(url, tag).text = entry[tag]

    body = ET.tostring(urlset, encoding="unicode")
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + body
