"""Constants for license-finder."""

# License name used when a dependency declares none
UNKNOWN_LICENSE = "unknown"

# Maven invocation
MAVEN_COMMAND = "mvn"
MAVEN_WRAPPER = "mvnw"
MAVEN_WRAPPER_WINDOWS = "mvnw.cmd"
MAVEN_POM = "pom.xml"
MAVEN_DOWNLOAD_LICENSES_GOAL = "org.codehaus.mojo:license-maven-plugin:download-licenses"
MAVEN_EXCLUDED_SCOPES_FLAG = "-Dlicense.excludedScopes"
MAVEN_PARENT_QUERY = "help:evaluate -Dexpression=project.parent -q -DforceStdout"

# Printed by help:evaluate with -DforceStdout when the expression is undefined
MAVEN_NULL_EXPRESSION = "null object or invalid expression"

# Report written by download-licenses, relative to each module directory
MAVEN_LICENSE_REPORT = ("target", "generated-resources", "licenses.xml")

MAVEN_CENTRAL_ARTIFACT_URL = "https://search.maven.org/artifact"
