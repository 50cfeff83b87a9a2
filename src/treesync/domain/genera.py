"""Reference table of tree genera found in municipal inventories."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True)
class Genus:
    name: str
    display_name: str


_GENERA: Final[tuple[Genus, ...]] = (
    Genus("Abies", "Tanne"),
    Genus("Acer", "Ahorn"),
    Genus("Aesculus", "Rosskastanie"),
    Genus("Ailanthus", "Götterbaum"),
    Genus("Alnus", "Erle"),
    Genus("Amelanchier", "Felsenbirne"),
    Genus("Betula", "Birke"),
    Genus("Carpinus", "Hainbuche"),
    Genus("Castanea", "Edelkastanie"),
    Genus("Catalpa", "Trompetenbaum"),
    Genus("Celtis", "Zürgelbaum"),
    Genus("Cercidiphyllum", "Kuchenbaum"),
    Genus("Chamaecyparis", "Scheinzypresse"),
    Genus("Corylus", "Hasel"),
    Genus("Cornus", "Hartriegel"),
    Genus("Crataegus", "Weißdorn"),
    Genus("Fagus", "Buche"),
    Genus("Fraxinus", "Esche"),
    Genus("Ginkgo", "Ginkgo"),
    Genus("Gleditsia", "Gleditschie"),
    Genus("Gymnocladus", "Geweihbaum"),
    Genus("Juglans", "Walnuss"),
    Genus("Koelreuteria", "Blasenbaum"),
    Genus("Laburnum", "Goldregen"),
    Genus("Larix", "Lärche"),
    Genus("Liquidambar", "Amberbaum"),
    Genus("Liriodendron", "Tulpenbaum"),
    Genus("Magnolia", "Magnolie"),
    Genus("Malus", "Apfel"),
    Genus("Metasequoia", "Urweltmammutbaum"),
    Genus("Morus", "Maulbeere"),
    Genus("Ostrya", "Hopfenbuche"),
    Genus("Parrotia", "Parrotie"),
    Genus("Paulownia", "Blauglockenbaum"),
    Genus("Picea", "Fichte"),
    Genus("Pinus", "Kiefer"),
    Genus("Platanus", "Platane"),
    Genus("Populus", "Pappel"),
    Genus("Prunus", "Kirsche"),
    Genus("Pseudotsuga", "Douglasie"),
    Genus("Pterocarya", "Flügelnuss"),
    Genus("Pyrus", "Birne"),
    Genus("Quercus", "Eiche"),
    Genus("Robinia", "Robinie"),
    Genus("Salix", "Weide"),
    Genus("Sambucus", "Holunder"),
    Genus("Sophora", "Schnurbaum"),
    Genus("Sorbus", "Eberesche"),
    Genus("Styphnolobium", "Schnurbaum"),
    Genus("Taxodium", "Sumpfzypresse"),
    Genus("Taxus", "Eibe"),
    Genus("Thuja", "Lebensbaum"),
    Genus("Tilia", "Linde"),
    Genus("Tsuga", "Hemlocktanne"),
    Genus("Ulmus", "Ulme"),
    Genus("Zelkova", "Zelkove"),
)

GENUS_MAP: Final[dict[str, Genus]] = {genus.name: genus for genus in _GENERA}


def lookup_genus(name: str | None) -> Genus | None:
    if not name:
        return None
    return GENUS_MAP.get(name)
