"""Shared fixtures for guard generation tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from guardgen.guard.locator import find_class_node
from guardgen.parsing.treesitter import TreeSitterParser

PLUGIN_SOURCE = """\
import { Injectable } from '@angular/core';
import { Cordova, AwesomeCordovaNativePlugin, Plugin } from '@awesome-cordova-plugins/core';
import { Observable } from 'rxjs';

export interface CameraOptions {
  quality?: number;
}

@Plugin({
  pluginName: 'Camera',
  plugin: 'cordova-plugin-camera',
})
@Injectable()
export class Camera extends AwesomeCordovaNativePlugin {
  DestinationType = { DATA_URL: 0 };

  constructor() {
    super();
  }

  get ready(): boolean {
    return true;
  }

  @Cordova()
  getPicture(options?: CameraOptions): Promise<any> {
    return;
  }

  @Cordova({ observable: true })
  watchPictures(interval: number, ...tags: string[]): Observable<string> {
    return;
  }

  cleanup(): void {
    return;
  }

  batch(): Observable<string>[] {
    return [];
  }

  untyped(value) {
    return value;
  }
}
"""


@pytest.fixture
def parser() -> TreeSitterParser:
    return TreeSitterParser()


@pytest.fixture
def parse_class(parser: TreeSitterParser) -> Callable[[str, str], Any]:
    """Parse source text and return the named top-level class node."""

    def _parse(source: str, name: str) -> Any:
        result = parser.parse(source, "index.ts")
        node = find_class_node(result.root_node, name)
        assert node is not None, f"class {name} not found"
        return node

    return _parse


@pytest.fixture
def plugin_source() -> str:
    return PLUGIN_SOURCE
