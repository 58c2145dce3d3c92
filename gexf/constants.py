"""
    Fixed GEXF 1.2 format constants.
"""

VERSION = "1.2"

GEXF_NAMESPACE = "http://www.gexf.net/1.2draft"
VIZ_NAMESPACE = "http://www.gexf.net/1.2draft/viz"

ROOT_TAG = "gexf"

# Wire form of every date attribute, i.e. 2009-03-20
DATE_FORMAT = "%Y-%m-%d"
