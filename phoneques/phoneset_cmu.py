"""CMU phoneset."""

# Copyright 2011, 2012, 2013, 2014, 2015 Matt Shannon
# The follow copyrights may apply to the list of phone subsets:
#     Copyright 2001-2008 Nagoya Institute of Technology, Department of Computer Science
#     Copyright 2001-2008 Tokyo Institute of Technology, Interdisciplinary Graduate School of Science and Engineering
# The following copyrights may apply to the phoneset, which is based on the CMU pronouncing dictionary (which is in turn based on ARPAbet):
#     Copyright 1993-2008 Carnegie Mellon University

# This file is part of phoneques.
# See `License` for details of license and warranty.

from phoneques.phoneset import PhoneInventory

# phones of the HTS demo version of the CMU phoneset
phoneListString = (
    'aa ae ah ao aw ax ay b ch d dh eh er ey f g hh ih iy jh k l m n ng ow oy'
    ' p pau r s sh t th uh uw v w y z zh'
)

# some subsets also mention phones outside the phone list above (e.g. axr,
#   dx, el, em, en, hv, ix, nx, h#, brth)
namedPhoneSubsetStrings = [
    ('Vowel', 'aa ae ah ao aw ax axr ay eh el em en er ey ih ix iy ow oy uh uw'),
    ('Consonant', 'b ch d dh dx f g hh hv jh k l m n nx ng p r s sh t th v w y z zh'),
    ('Stop', 'b d dx g k p t'),
    ('Nasal', 'm n en ng'),
    ('Fricative', 'ch dh f hh hv s sh th v z zh'),
    ('Liquid', 'el hh l r w y'),
    ('Front', 'ae b eh em f ih ix iy m p v w'),
    ('Central', 'ah ao axr d dh dx el en er l n r s t th z zh'),
    ('Back', 'aa ax ch g hh jh k ng ow sh uh uw y'),
    ('Front_Vowel', 'ae eh ey ih iy'),
    ('Central_Vowel', 'aa ah ao axr er'),
    ('Back_Vowel', 'ax ow uh uw'),
    ('Long_Vowel', 'ao aw el em en iy ow uw'),
    ('Short_Vowel', 'aa ah ax ay eh ey ih ix oy uh'),
    ('Dipthong_Vowel', 'aw axr ay el em en er ey oy'),
    ('High_Vowel', 'ih ix iy uh uw'),
    ('Medium_Vowel', 'ae ah ax axr eh el em en er ey ow'),
    ('Low_Vowel', 'aa ae ah ao aw ay oy'),
    ('Rounded_Vowel', 'ao ow oy uh uw w'),
    ('Reduced_Vowel', 'ax axr ix'),
    ('Unvoiced_Consonant', 'ch f hh k p s sh t th'),
    ('Voiced_Consonant', 'b d dh dx el em en g jh l m n ng r v w y'),
    ('Continuent', 'dh el em en f hh l m n ng r s sh th v w y z zh'),
    ('No_Continuent', 'b ch d g jh k p t'),
    ('Glide', 'hh l el r y w'),
    ('Voiced_Stop', 'b d g'),
    ('Unvoiced_Stop', 'p t k'),
    ('Voiced_Fricative', 'jh dh v z zh'),
    ('Unvoiced_Fricative', 'ch f s sh th'),
    ('Affricate_Consonant', 'ch jh'),
    ('silence', 'pau h# brth'),
]

class CmuPhoneset(PhoneInventory):
    def __init__(self):
        PhoneInventory.__init__(
            self,
            phoneListString.split(),
            [ (subsetName, subsetString.split())
              for subsetName, subsetString in namedPhoneSubsetStrings ]
        )

phonesetNames = {
    'cmu': CmuPhoneset,
}
