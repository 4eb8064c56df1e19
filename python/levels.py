"""
Bundled levels. See terrain_parser for the character legend.
"""

LEVELS = dict(
    level0="""
        ------
        --ST--
        --oo--
        --oo--
        ------
    """,
    level1="""
        ooo-------
        oSoooo----
        ooooooooo-
        -ooooooooo
        -----ooToo
        ------ooo-
    """,
    level3="""
        ------ooooooo--
        oooo--ooo--oo--
        ooooooooo--oooo
        oSoo-------ooTo
        oooo-------oooo
        ------------ooo
    """,
    level6="""
        -----oooooo----
        -----o--ooo----
        -----o--ooooo--
        Sooooo-----oooo
        ----ooo----ooTo
        ----ooo-----ooo
        ------o--oooo--
        ------ooooo----
        ------ooooo----
        -------ooo-----
    """,
    # Standing blocks only land on every third cell of a corridor
    corridor="SoooooT",
    blocked="SoooT",
    island="So--|oo--|---T",
)
