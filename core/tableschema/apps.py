from django.apps import AppConfig

class TableSchemaConfig(AppConfig):
  name = "tableschema"
  label = "tableschema"
  verbose_name = "BigQuery table schema"
