from jqpath.testing import jqpath_config, sample_document

__all__ = ["jqpath_config", "sample_document"]
