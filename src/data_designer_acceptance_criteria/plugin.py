from data_designer.plugins.plugin import Plugin, PluginType

acceptance_criteria_plugin = Plugin(
    config_qualified_name="data_designer_acceptance_criteria.config.AcceptanceCriteriaColumnConfig",
    impl_qualified_name="data_designer_acceptance_criteria.generator.AcceptanceCriteriaColumnGenerator",
    plugin_type=PluginType.COLUMN_GENERATOR,
)
