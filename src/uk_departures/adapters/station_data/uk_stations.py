"""Common UK railway stations and their CRS codes.

Order matters: the first alias listed for a code is the name shown for it.
"""

UK_STATION_ALIASES: tuple[tuple[str, str], ...] = (
    # London terminals
    ("Paddington", "PAD"),
    ("London Paddington", "PAD"),
    ("King's Cross", "KGX"),
    ("Kings Cross", "KGX"),
    ("London Kings Cross", "KGX"),
    ("Euston", "EUS"),
    ("London Euston", "EUS"),
    ("Liverpool Street", "LST"),
    ("London Liverpool Street", "LST"),
    ("Victoria", "VIC"),
    ("London Victoria", "VIC"),
    ("Waterloo", "WAT"),
    ("London Waterloo", "WAT"),
    ("St Pancras International", "STP"),
    ("London St Pancras", "STP"),
    ("London Bridge", "LBG"),
    ("Charing Cross", "CHX"),
    ("London Charing Cross", "CHX"),
    ("Marylebone", "MYB"),
    ("London Marylebone", "MYB"),
    ("Fenchurch Street", "FST"),
    ("London Fenchurch Street", "FST"),
    # Major cities
    ("Birmingham New Street", "BHM"),
    ("Manchester Piccadilly", "MAN"),
    ("Manchester Airport", "MIA"),
    ("Leeds", "LDS"),
    ("Liverpool Lime Street", "LIV"),
    ("Edinburgh", "EDB"),
    ("Edinburgh Waverley", "EDB"),
    ("Glasgow Central", "GLC"),
    ("Glasgow Queen Street", "GLQ"),
    ("Cardiff Central", "CDF"),
    ("Bristol Temple Meads", "BRI"),
    ("Bristol Parkway", "BPW"),
    ("Newcastle", "NCL"),
    ("Sheffield", "SHF"),
    ("Nottingham", "NOT"),
    ("Southampton Central", "SOU"),
    ("Reading", "RDG"),
    ("Brighton", "BTN"),
    ("Oxford", "OXF"),
    ("Cambridge", "CBG"),
    ("York", "YRK"),
    ("Bath Spa", "BTH"),
    ("Exeter St Davids", "EXD"),
    ("Plymouth", "PLY"),
    ("Aberdeen", "ABD"),
    ("Inverness", "INV"),
    ("Peterborough", "PBO"),
    ("Coventry", "COV"),
    ("Leicester", "LEI"),
    ("Derby", "DBY"),
    ("Norwich", "NRW"),
    ("Ipswich", "IPS"),
    ("Portsmouth Harbour", "PMH"),
    ("Bournemouth", "BMH"),
    ("Swindon", "SWI"),
    ("Dundee", "DEE"),
    ("Cheltenham Spa", "CNM"),
    ("Stratford", "SRA"),
    ("Clapham Junction", "CLJ"),
    # Airports and other common stations
    ("Gatwick Airport", "GTW"),
    ("Heathrow Airport", "HXX"),
    ("Stansted Airport", "SSD"),
    ("Luton Airport Parkway", "LTN"),
    ("Milton Keynes Central", "MKC"),
    ("Guildford", "GLD"),
    ("Winchester", "WIN"),
    ("Salisbury", "SAL"),
    ("Chester", "CTR"),
    ("Preston", "PRE"),
    ("Lancaster", "LAN"),
    ("Carlisle", "CAR"),
    ("Durham", "DHM"),
    ("Sunderland", "SUN"),
    ("Middlesbrough", "MBR"),
    ("Hull", "HUL"),
    ("Doncaster", "DON"),
    ("Wakefield Westgate", "WKF"),
    ("Bradford Forster Square", "BDQ"),
    ("Harrogate", "HGT"),
    ("Scarborough", "SCA"),
    ("Wolverhampton", "WVH"),
    ("Stoke-on-Trent", "SOT"),
    ("Crewe", "CRE"),
    ("Blackpool North", "BPN"),
    ("Stirling", "STG"),
    ("Perth", "PTH"),
    ("Swansea", "SWA"),
    ("Newport", "NWP"),
    ("Gloucester", "GCR"),
    ("Worcester Foregate Street", "WOF"),
    ("Hereford", "HFD"),
    ("Shrewsbury", "SHR"),
    ("Wrexham General", "WRX"),
    ("Bangor", "BNG"),
    ("Holyhead", "HHD"),
)
