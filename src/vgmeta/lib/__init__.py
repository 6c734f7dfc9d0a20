"""Domain-specific library modules.

Modules here import vgmeta domain models and turn album and search pages
into them. Pure utilities that don't depend on domain models live in
``vgmeta.utils`` instead.

Consumers should import directly from submodules::

    from vgmeta.lib.album import assemble_album
    from vgmeta.lib.tracklist import align_track_list
"""
