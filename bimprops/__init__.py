"""bimprops: browse and edit the properties of BIM component families.

Families reference option groups stored in one shared JSON file. This
package resolves those references, builds a category-ordered view,
validates it, and writes single-property edits back to the shared file.
"""

__version__ = "0.1.0"
